"""Known sample templates and their source repositories."""
from dataclasses import dataclass
from typing import Dict, List

from sampler.core.errors import ConfigurationError

SAMPLES_ORG_URL = "https://github.com/stripe-samples"


@dataclass(frozen=True)
class SampleInfo:
    """A template repository that can be scaffolded."""

    name: str
    description: str
    url: str


def _sample(name: str, description: str) -> SampleInfo:
    return SampleInfo(name=name, description=description, url=f"{SAMPLES_ORG_URL}/{name}.git")


SAMPLES: Dict[str, SampleInfo] = {
    sample.name: sample
    for sample in (
        _sample("accept-a-payment", "Accept a one-time payment with Checkout or Elements"),
        _sample("checkout-one-time-payments", "Hosted Checkout page for one-time payments"),
        _sample("checkout-single-subscription", "Hosted Checkout page for a recurring subscription"),
        _sample("subscription-use-cases", "Fixed-price and usage-based subscriptions"),
        _sample("connect-onboarding-for-express", "Onboard Express accounts to a platform"),
        _sample("placing-a-hold-on-a-card", "Authorize now, capture the payment later"),
        _sample("saving-card-without-payment", "Save a card for later payments"),
        _sample("identity", "Verify a user's identity document"),
    )
}


def is_git_url(identifier: str) -> bool:
    return identifier.startswith(("https://", "http://", "git@", "ssh://", "file://"))


def list_samples() -> List[SampleInfo]:
    """Return known samples sorted by name."""
    return sorted(SAMPLES.values(), key=lambda sample: sample.name)


def resolve_sample(identifier: str) -> SampleInfo:
    """Resolve a sample name or git URL to its source.

    A git URL is accepted as-is; its cache name is the last path segment
    without a ``.git`` suffix.

    Raises:
        ConfigurationError: Unknown sample name or unusable URL
    """
    if identifier in SAMPLES:
        return SAMPLES[identifier]

    if is_git_url(identifier):
        tail = identifier.rstrip("/").replace(":", "/").rsplit("/", 1)[-1]
        name = tail[:-4] if tail.endswith(".git") else tail
        if not name or name in {".", ".."}:
            raise ConfigurationError(f"Cannot derive a sample name from '{identifier}'")
        return SampleInfo(name=name, description=identifier, url=identifier)

    raise ConfigurationError(
        f"Unknown sample '{identifier}'. Run 'sampler list' to see available samples."
    )
