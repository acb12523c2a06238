import sys

from embedgen.cli import main

sys.exit(main())
