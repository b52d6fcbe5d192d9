"""Basic flooding protection and its per-minute message threshold."""
from roomguard.protections.protection import Protection
from roomguard.protections.protection_settings import NumberProtectionSetting

# Messages allowed per user within a 60 second window
MAX_PER_MINUTE = 10
MAX_PER_MINUTE_LOWER_BOUND = 1
MAX_PER_MINUTE_UPPER_BOUND = 1000


class BasicFlooding(Protection):
    """Bans users who post more than ``maxPerMinute`` messages in 60 seconds."""

    name = "BasicFloodingProtection"
    description = (
        f"If a user posts more than {MAX_PER_MINUTE} messages in 60s they'll be "
        "banned for spam. This does not publish the ban to any of your ban lists."
    )

    def __init__(self) -> None:
        super().__init__()
        self.settings["maxPerMinute"] = NumberProtectionSetting(
            MAX_PER_MINUTE,
            min=MAX_PER_MINUTE_LOWER_BOUND,
            max=MAX_PER_MINUTE_UPPER_BOUND,
        )

    @property
    def max_per_minute(self) -> int:
        return self.settings["maxPerMinute"].value
