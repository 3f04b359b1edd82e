import os, sys
import warnings
from pathlib import Path

# Add src/ to sys.path so tests run without an editable install
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

# Required settings must exist before ops_bridge.config is imported
os.environ.setdefault("DISCORD_TOKEN", "test-token")
os.environ.setdefault("CLIENT_ID", "1")
os.environ.setdefault("GUILD_ID", "100")
os.environ.setdefault("OPS_SHARED_SECRET", "s3cret")
os.environ.setdefault("PUBLIC_OPS_CHANNEL_ID", "500")
os.environ.setdefault("OPS_PORTAL_URL", "https://ops.example.test/sign-in")

# Silence deprecation warnings surfaced from third-party dependencies during tests
warnings.filterwarnings(
    "ignore", category=DeprecationWarning, module=r"^discord\\.player$"
)
warnings.filterwarnings("ignore", "'audioop' is deprecated", DeprecationWarning)


def pytest_configure(config):
    warnings.filterwarnings(
        "ignore", category=DeprecationWarning, module=r"^discord\\.player$"
    )
    warnings.filterwarnings("ignore", "'audioop' is deprecated", DeprecationWarning)
