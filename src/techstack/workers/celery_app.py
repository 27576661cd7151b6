"""Celery application configuration."""

from celery import Celery
from kombu import Queue, Exchange

from techstack.config import settings

celery_app = Celery(
    "techstack",
    broker=settings.celery_broker_url,
    backend=settings.celery_result_backend,
    include=[
        "techstack.workers.tasks.seed",
    ],
)

# Task queues
celery_app.conf.task_queues = [
    Queue("seed", Exchange("seed"), routing_key="seed"),
    Queue("default", Exchange("default"), routing_key="default"),
]

# Task routing
celery_app.conf.task_routes = {
    "techstack.workers.tasks.seed.*": {"queue": "seed"},
}

# Concurrency settings
celery_app.conf.worker_concurrency = 2
celery_app.conf.worker_prefetch_multiplier = 1

# Task serialization
celery_app.conf.task_serializer = "json"
celery_app.conf.result_serializer = "json"
celery_app.conf.accept_content = ["json"]

# Result expiration
celery_app.conf.result_expires = 86400  # 24 hours

# Timezone
celery_app.conf.timezone = "UTC"
celery_app.conf.enable_utc = True
