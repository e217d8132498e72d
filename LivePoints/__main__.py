import sys

from LivePoints.app import main

sys.exit(main())
