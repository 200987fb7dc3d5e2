from typing import TypedDict


class WBResultDict(TypedDict):
    name: str
    file_size: int
    file_count: int
    rounds: int
    total_bytes: int
    seconds_min: float
    seconds_max: float
    seconds_mean: float
    throughput_min: float
    throughput_max: float
    throughput_mean: float
    unit: str
