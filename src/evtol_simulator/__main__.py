import sys

from evtol_simulator.cli import main

sys.exit(main())
