import sys

from mlisp.cli import main

sys.exit(main())
