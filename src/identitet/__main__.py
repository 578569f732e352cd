import sys

from identitet.cli import main

sys.exit(main())
