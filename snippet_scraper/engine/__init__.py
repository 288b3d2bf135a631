"""Engine components: fetch → extract → hand off."""

from .channel import BoundedChannel, ChannelClosed, Sender
from .extractor import Extractor
from .fetcher import FetchResponse, Fetcher, build_client
from .outcome import Outcome, OutcomeKind
from .worker import TargetWorker, parse_target

__all__ = [
    "BoundedChannel",
    "ChannelClosed",
    "Extractor",
    "FetchResponse",
    "Fetcher",
    "Outcome",
    "OutcomeKind",
    "Sender",
    "TargetWorker",
    "build_client",
    "parse_target",
]
