import sys

from reduct.interpreter import main

sys.exit(main())
