from __future__ import annotations

from pathlib import Path
from typing import List, Optional
import yaml
from pydantic import BaseModel, Field

# ---- Issuing office (the fixed prefix of every certificate number) ----
class OfficeCode(BaseModel):
    jurisdiction: str = "WB"   # state
    district: str = "MSD"      # sub-jurisdiction
    office: str = "BRW"        # registrar's office

    @property
    def segments(self) -> List[str]:
        return [self.jurisdiction, self.district, self.office]

    @property
    def legacy_prefix(self) -> str:
        """Hyphenated prefix, e.g. 'WB-MSD-BRW-'."""
        return "-".join(self.segments) + "-"

    @property
    def compact_prefix(self) -> str:
        """Separator-free prefix, e.g. 'WBMSDBRW'."""
        return "".join(self.segments)


# ---- Compact-form heuristics (tune without code changes) ----
class CompactRules(BaseModel):
    # A 4-digit run only counts as a year inside the compact form when it
    # starts with one of these.
    year_prefixes: List[str] = Field(default_factory=lambda: ["19", "20"])


# ---- Root config ----
class CertnoConfig(BaseModel):
    office: OfficeCode = Field(default_factory=OfficeCode)
    compact: CompactRules = Field(default_factory=CompactRules)


DEFAULT_OFFICE = OfficeCode()


# ---- Loader ----
def load_config(path: Optional[Path]) -> CertnoConfig:
    if not path:
        return CertnoConfig()
    data = yaml.safe_load(Path(path).read_text()) or {}
    return CertnoConfig(**data)
