"""Catalog of resources a sample may need to exist on the account.

The catalog is fixed at import time. Samples reference entries by name in
``requiredResources`` and the created ids are persisted under the same name.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple


@dataclass(frozen=True)
class RequiredResourceTemplate:
    """How to create one kind of required resource.

    Attributes:
        name: Identifies the resource in ``.cli.json`` and in the profile
        description: Shown when asking whether to auto-create
        http_path: API path to POST to
        data: Ordered ``key=value`` form fields
    """

    name: str
    description: str
    http_path: str
    data: Tuple[str, ...]


def _build_catalog(*templates: RequiredResourceTemplate) -> Mapping[str, RequiredResourceTemplate]:
    return MappingProxyType({template.name: template for template in templates})


CATALOG: Mapping[str, RequiredResourceTemplate] = _build_catalog(
    RequiredResourceTemplate(
        name="stripe_samples_price_recurring_basic_id",
        description="recurring price for a 'basic' plan",
        http_path="/v1/prices",
        data=(
            "currency=usd",
            "unit_amount=1000",
            "product_data[name]=Stripe Sample Basic",
            "recurring[interval]=month",
        ),
    ),
    RequiredResourceTemplate(
        name="stripe_samples_price_recurring_pro_id",
        description="recurring price for a 'pro' plan",
        http_path="/v1/prices",
        data=(
            "currency=usd",
            "unit_amount=1000",
            "product_data[name]=Stripe Sample Pro",
            "recurring[interval]=month",
        ),
    ),
)


def get_required_resource(name: str) -> Optional[RequiredResourceTemplate]:
    """Look up a catalog entry by name, or None if unknown."""
    return CATALOG.get(name)
