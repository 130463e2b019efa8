"""Generate the OpenAPI schema from the FastAPI app.

Usage: python scripts/generate_openapi.py [output.json]
Prints to stdout when no output path is given.
"""

import json
import sys
from pathlib import Path

from adyen_checkout.main import app

if __name__ == "__main__":
    schema = json.dumps(app.openapi(), indent=2)
    if len(sys.argv) > 1:
        Path(sys.argv[1]).write_text(schema + "\n")
    else:
        print(schema)
