"""Testing generators – record builders and Hypothesis strategies."""
from listquery.testing.generators.builder import Builder, OwnerBuilder, RecordBuilder, VehicleBuilder
from listquery.testing.generators.strategies import dataset_strategy, vehicle_record_strategy

__all__ = [
    "Builder",
    "OwnerBuilder",
    "RecordBuilder",
    "VehicleBuilder",
    "dataset_strategy",
    "vehicle_record_strategy",
]
