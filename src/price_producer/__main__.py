import sys

from price_producer.console import main

sys.exit(main())
