import sys

from vin.app import main

sys.exit(main())
