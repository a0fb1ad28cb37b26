import sys

from hdr_pipeline.cli import main

sys.exit(main())
