from prometheus_client import Counter, Gauge


class LiveUpdateMetrics:
    """
    Live update broadcast metrics

    Tracks how many announcements are published, how many observers are
    connected and how each per-connection delivery attempt ended.
    """

    def __init__(self):
        self.announcements_published = Counter(
            'live_update_announcements_published_total',
            'Announcements appended to the update store',
        )

        self.observers_connected = Gauge(
            'live_update_observers_connected',
            'Observer connections currently registered with the broadcast hub',
        )

        self.deliveries = Counter(
            'live_update_deliveries_total',
            'Per-connection delivery attempts',
            ['result'],  # result: delivered/skipped/failed
        )

    def record_published(self):
        self.announcements_published.inc()

    def record_observer_registered(self):
        self.observers_connected.inc()

    def record_observer_unregistered(self):
        self.observers_connected.dec()

    def record_deliveries(self, *, delivered: int, skipped: int, failed: int):
        self.deliveries.labels(result='delivered').inc(delivered)
        self.deliveries.labels(result='skipped').inc(skipped)
        self.deliveries.labels(result='failed').inc(failed)


# Global metrics instance
metrics = LiveUpdateMetrics()
