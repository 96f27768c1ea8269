"""
Trigger Serializer

Structure (inside the asset's compressed block, after the presence flag):
- u32 version (800)
- pascal string name
- pascal string condition
- u32 moment (0 = begin step, 1 = step, 2 = end step)
- pascal string constant_name
"""

from ..constants import TRIGGER_VERSION
from ..data_types import GameVersion, Trigger
from ..utils import write_u32
from .primitives import write_pas_string


class TriggerSerializer:
    """AssetSerializer for triggers. Same layout in 8.0 and 8.1."""

    def write(self, writer, trigger: Trigger, version: GameVersion) -> int:
        result = write_u32(writer, TRIGGER_VERSION)
        result += write_pas_string(writer, trigger.name)
        result += write_pas_string(writer, trigger.condition)
        result += write_u32(writer, int(trigger.moment))
        result += write_pas_string(writer, trigger.constant_name)
        return result


def write_trigger(writer, trigger: Trigger, version: GameVersion) -> int:
    """Function form of TriggerSerializer.write."""
    return TriggerSerializer().write(writer, trigger, version)
