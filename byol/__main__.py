import sys

from byol.cmdline import main

sys.exit(main())
