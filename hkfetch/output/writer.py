import json
import os
from typing import Optional
from hkfetch.core.config import settings
from hkfetch.schemas import FetchBundle

def write_bundle(bundle: FetchBundle, output_path: Optional[str] = None) -> str:
    """Serialize the bundle as pretty-printed JSON, replacing any previous file"""
    path = output_path or settings.OUTPUT_PATH

    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    payload = json.dumps(bundle.model_dump(by_alias=True), indent=2, ensure_ascii=False)
    with open(path, "w", encoding="utf-8") as f:
        f.write(payload)

    return path
