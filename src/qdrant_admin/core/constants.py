"""Central constants shared by collection provisioning and shard-key routing."""

from typing import Final

# Number of keyword shard keys per collection. Writers routing documents to
# shards must use the same value (see services.shard_keys.route_shard_key).
SHARD_KEY_COUNT: Final[int] = 24

# HNSW graph: no per-segment vector graph, payload graph only.
HNSW_M: Final[int] = 0
HNSW_PAYLOAD_M: Final[int] = 16

# Segments above this size (in KB) are stored as memmaps.
MEMMAP_THRESHOLD_KB: Final[int] = 16384

# Scalar int8 quantization calibration.
QUANTIZATION_QUANTILE: Final[float] = 0.99

# Sharding topology.
SHARD_NUMBER: Final[int] = 2
REPLICATION_FACTOR: Final[int] = 2
WRITE_CONSISTENCY_FACTOR: Final[int] = 1
