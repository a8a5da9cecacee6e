import multiprocessing, os

# gunicorn -c gunicorn.conf.py wsgi:app
wsgi_app = "wsgi:app"
bind = os.getenv("BIND", "0.0.0.0:8080")

workers = int(os.getenv("WEB_CONCURRENCY", max(2, multiprocessing.cpu_count() * 2 + 1)))
threads = int(os.getenv("WEB_THREADS", "2"))
worker_class = "gthread"

timeout = int(os.getenv("WEB_TIMEOUT", "30"))
graceful_timeout = timeout
keepalive = 5

# stdout/stderr; the app logger attaches to gunicorn.error
accesslog = "-"
errorlog = "-"
loglevel = os.getenv("LOG_LEVEL", "info").lower()
