"""
Pytest configuration and shared fixtures.
This file ensures the project root is in sys.path for imports and points the
queue database and event log at a throwaway directory before settings load.
"""

import os
import sys
import tempfile
from pathlib import Path

_tmp_dir = Path(tempfile.mkdtemp(prefix="patterns-tests-"))
os.environ.setdefault("QUEUE_DATABASE_URL", f"sqlite:///{_tmp_dir / 'commands.sqlite'}")
os.environ.setdefault("EVENT_LOG_PATH", str(_tmp_dir / "log.txt"))
os.environ.setdefault("ENVIRONMENT", "testing")

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))
