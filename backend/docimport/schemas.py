import os
from typing import Dict, Tuple
from pydantic import BaseModel, ConfigDict

class ExtensionConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    accepted: Tuple[str, ...]
    mapping: Dict[str, str] = {}

    def accepts(self, path: str) -> bool:
        return os.path.splitext(path)[1].lower() in self.accepted

    def upload_name(self, filename: str) -> str:
        """Name the file is advertised under, with its extension remapped if configured."""
        base, ext = os.path.splitext(filename)
        target = self.mapping.get(ext.lower())
        if target is None:
            return filename
        return base + target

class ImportSummary(BaseModel):
    total_files: int
    candidates: int
    uploaded: int = 0
