import sys

from cmdterm.main import main

sys.exit(main())
