"""readme.txt written next to settings.json on every load."""

import sys
from pathlib import Path
from typing import Optional, Union

from death_shock.config import README_FILENAME


def _log(msg: str):
    print(msg, file=sys.stderr)


README_TEXT = """\
=======================================================
        OpenShock Mod Configuration Documentation
=======================================================

The `settings.json` file configures the OpenShock mod.
It must be valid JSON and include the required fields.

-------------------------------------------------------
Supported Fields
-------------------------------------------------------

+----------------+---------+----------+-------------------+------------------------------------------------+
| Field Name     | Type    | Required | Default Value     | Description                                    |
+----------------+---------+----------+-------------------+------------------------------------------------+
| shockerID      | string  | Yes      | N/A               | Unique ID for the shocker device.              |
| OpenShockToken | string  | Yes      | N/A               | API token for the OpenShock service.           |
| minDuration    | integer | No       | 300               | Minimum shock duration (ms). Must be >= 300.   |
| maxDuration    | integer | No       | 30000             | Maximum shock duration (ms). Must be <= 30000. |
| minIntensity   | integer | No       | 1                 | Minimum shock intensity. Must be >= 1.         |
| maxIntensity   | integer | No       | 100               | Maximum shock intensity. Must be <= 100.       |
| customName     | string  | Yes      | N/A               | Custom name for the shock control session.     |
| endpointDomain | string  | No       | api.openshock.app | API endpoint domain.                           |
+----------------+---------+----------+-------------------+------------------------------------------------+

-------------------------------------------------------
Validation Rules
-------------------------------------------------------

1. Duration range:
   - minDuration must be >= 300.
   - maxDuration must be <= 30000.
   - minDuration must not exceed maxDuration.

2. Intensity range:
   - minIntensity must be >= 1.
   - maxIntensity must be <= 100.
   - minIntensity must not exceed maxIntensity.

3. Required fields:
   - shockerID, OpenShockToken and customName must be present and not empty.

4. Endpoint domain:
   - If endpointDomain is missing or empty, api.openshock.app is used.

-------------------------------------------------------
Example Configuration File
-------------------------------------------------------

{
    "shockerID": "7a3e1c5b-fb7c-4b1c-8b6e-6a2e1f8b7d92",
    "OpenShockToken": "your-openshock-api-token",
    "minDuration": 500,
    "maxDuration": 10000,
    "minIntensity": 10,
    "maxIntensity": 90,
    "customName": "ShockControl",
    "endpointDomain": "api.customdomain.com"
}

-------------------------------------------------------
Default Behavior
-------------------------------------------------------

- If optional fields are omitted:
  - minDuration: 300
  - maxDuration: 30000
  - minIntensity: 1
  - maxIntensity: 100
  - endpointDomain: api.openshock.app

-------------------------------------------------------
Error Handling
-------------------------------------------------------

- An invalid configuration stops the shock for that death.
- Errors are logged and shown in-game as pop-ups.
- Required fields must not be empty.
- Make sure endpointDomain is a reachable host if you set it.

-------------------------------------------------------

For further help, consult the OpenShock API documentation.
"""


def write_docs(config_dir: Union[str, Path]) -> Optional[Path]:
    """Overwrite readme.txt in config_dir. Returns the path, or None on failure."""
    path = Path(config_dir) / README_FILENAME
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(README_TEXT, encoding="utf-8")
    except OSError as e:
        _log(f"Failed to create {README_FILENAME} in {path.parent}: {e}")
        return None
    return path
