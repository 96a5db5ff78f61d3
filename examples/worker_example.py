"""Example worker emitting metrics to InfluxDB over UDP.

Run with:
    INFLUXDB_URL=influxdb://localhost:8089/myapp python examples/worker_example.py

Measurements (prefixed with the database name):
    myapp.jobs_started      - counter, every job
    myapp.jobs_failed       - counter, failed jobs
    myapp.job_duration      - timing in microseconds, 10% of jobs
    myapp.queue_depth       - raw value via record(), every loop

Without INFLUXDB_URL the script still runs; every metric call is a no-op.
"""

import logging
import random
import time

import influxmetrics

logging.basicConfig(level=logging.INFO)

influxmetrics.set_default(influxmetrics.connect_from_env())


def process(job: int) -> None:
    """Pretend to do some work, failing now and then."""
    time.sleep(random.random() / 20)  # noqa: S311
    if job % 7 == 0:
        raise RuntimeError(f"job {job} failed")


def main() -> None:
    emitter = influxmetrics.get_default()
    assert emitter is not None
    try:
        for job in range(50):
            emitter.increment("jobs_started")
            with emitter.timer("job_duration", sample_rate=0.1):
                try:
                    process(job)
                except RuntimeError:
                    emitter.increment("jobs_failed")
            influxmetrics.record(emitter, "queue_depth", ["value"], [50 - job])
    finally:
        influxmetrics.clear_default()
        emitter.close()


if __name__ == "__main__":
    main()
