import sys

from hyperterm.main import main


sys.exit(main())
