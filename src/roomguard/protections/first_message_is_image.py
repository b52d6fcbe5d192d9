"""First-message-is-image protection: name, description, no settings."""
from roomguard.protections.protection import Protection


class FirstMessageIsImage(Protection):
    """Bans users whose first message after joining is an image or video."""

    name = "FirstMessageIsImageProtection"
    description = (
        "If the first thing a user does after joining is to post an image or video, "
        "they'll be banned for spam. This does not publish the ban to any of your ban lists."
    )
