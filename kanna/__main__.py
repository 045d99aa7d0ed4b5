import sys

from kanna.cli import main

sys.exit(main())
