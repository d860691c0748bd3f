import sys

from src.demo.driver import main

sys.exit(main())
