import sys

from console_bank.app import main

sys.exit(main())
