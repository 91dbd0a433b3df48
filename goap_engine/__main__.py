import sys

from goap_engine.main import main

sys.exit(main())
