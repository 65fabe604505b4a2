"""Testing support – record builders and property-based strategies.

Import in your tests::

    from listquery.testing import VehicleBuilder, dataset_strategy
"""

from listquery.testing.generators import (
    Builder,
    OwnerBuilder,
    RecordBuilder,
    VehicleBuilder,
    dataset_strategy,
    vehicle_record_strategy,
)

__all__ = [
    "Builder",
    "OwnerBuilder",
    "RecordBuilder",
    "VehicleBuilder",
    "dataset_strategy",
    "vehicle_record_strategy",
]
