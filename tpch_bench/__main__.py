import sys

from tpch_bench.run_tpch import main

sys.exit(main())
