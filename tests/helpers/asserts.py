import os


def assert_aggregate_consistent(r):
    assert r.rounds >= 1
    assert 0.0 <= r.seconds_min <= r.seconds_mean <= r.seconds_max
    assert 0.0 <= r.throughput_min <= r.throughput_mean <= r.throughput_max


def assert_workload_on_disk(spec):
    names = sorted(os.listdir(spec.target_dir))
    expected = sorted(f"{spec.prefix}{i}" for i in range(spec.file_count))
    assert names == expected
    for path in spec.paths():
        assert path.stat().st_size == spec.file_size
