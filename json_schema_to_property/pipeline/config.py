"""
Configuration for the schema to Property mapper.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class MapperConfig:
    """Configuration options for mapping."""

    # Reinterpret legacy object wrappers whose "properties" hold a bare
    # {"type": "array"} marker as arrays. Off unless asked for.
    enable_array_quirk: bool = False

    # Attach the "xml" object of every schema to its Property
    attach_xml: bool = True

    # Copy x-* fields onto Properties
    collect_vendor_extensions: bool = True

    @staticmethod
    def from_dict(d: dict) -> MapperConfig:
        """Create a config from a dictionary."""
        config = MapperConfig()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "enable_array_quirk": self.enable_array_quirk,
            "attach_xml": self.attach_xml,
            "collect_vendor_extensions": self.collect_vendor_extensions,
        }
