from __future__ import annotations

import os
import tempfile
from pathlib import Path


# ``src.tubely.main`` builds a module-level app on import; point it at throwaway state
_RUNTIME_DIR = Path(tempfile.mkdtemp(prefix="tubely-tests-"))

os.environ.setdefault("TUBELY_JWT_SECRET", "test-signing-key")
os.environ.setdefault("TUBELY_DATABASE_URL", f"sqlite:///{_RUNTIME_DIR / 'tubely.db'}")
os.environ.setdefault("TUBELY_TEMP_ROOT", str(_RUNTIME_DIR / "staging"))
os.environ.setdefault("TUBELY_S3_REGION", "us-east-1")
