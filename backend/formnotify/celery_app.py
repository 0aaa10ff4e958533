from celery import Celery

from formnotify.core.config import get_settings

settings = get_settings()

celery = Celery(
    "formnotify",
    broker=settings.redis_url,
    backend=settings.redis_url,
)

# Import tasks
celery.conf.imports = ["formnotify.tasks"]

# Set task routes
celery.conf.task_routes = {
    "formnotify.tasks.deliver_notification": {"queue": "notifications"}
}
