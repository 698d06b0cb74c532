import sys

from itemq.cli import main

sys.exit(main())
