"""Exceptions raised while converting a cube into a Draftmancer list."""


class DraftmancerError(Exception):
    """Base class for every error raised by cube_draftmancer."""


class TransportError(DraftmancerError):
    """Downloading a card list from CubeCobra failed."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Error downloading card list from {url}: {reason}")


class ConfigurationError(DraftmancerError):
    """A raw pack layout cannot be expanded into named layouts."""


class UnknownRarityError(DraftmancerError, ValueError):
    """A card row carries a rarity token outside the known set."""

    def __init__(self, card_name: str, token: str):
        self.card_name = card_name
        self.token = token
        super().__init__(f"Unknown rarity {token!r} for card {card_name!r}")


class MalformedRecordError(DraftmancerError, IndexError):
    """A CSV row has fewer fields than the card list format requires."""

    def __init__(self, line_number: int, field_count: int, required: int):
        self.line_number = line_number
        self.field_count = field_count
        super().__init__(
            f"Line {line_number} has {field_count} fields, expected at least {required}"
        )


class MissingArgumentError(DraftmancerError):
    """A workflow was invoked without an argument it needs."""
