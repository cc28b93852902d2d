import sys

from tick_weather.cli import main

sys.exit(main())
