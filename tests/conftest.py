"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages.
"""

import sys
from pathlib import Path

import pytest

# Insert local src directory at the beginning of sys.path
# This ensures that the local locscan package is used, not any installed one
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

# Force reimport of locscan modules if already imported
for module_name in list(sys.modules.keys()):
    if module_name.startswith("locscan"):
        del sys.modules[module_name]

from locscan.scanning.models import ResourceEntry, ResourceOrigin  # noqa: E402
from locscan.scanning.trie import ReferenceTrie  # noqa: E402

NEUTRAL = ResourceOrigin("MyNs", "Resources", path="Resources.resx")
GERMAN = ResourceOrigin("MyNs", "Resources", culture="de-DE", path="Resources.de-DE.resx")


@pytest.fixture
def neutral_origin() -> ResourceOrigin:
    return NEUTRAL


@pytest.fixture
def german_origin() -> ResourceOrigin:
    return GERMAN


@pytest.fixture
def greeting_trie() -> ReferenceTrie:
    """MyNs.Resources.Greeting in a neutral and a de-DE file."""
    return ReferenceTrie.build(
        [
            ResourceEntry.from_origin(NEUTRAL, "Greeting", "Hi"),
            ResourceEntry.from_origin(GERMAN, "Greeting", "Hallo"),
            ResourceEntry.from_origin(NEUTRAL, "Farewell", "Bye"),
        ]
    )
