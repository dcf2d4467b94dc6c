"""
Service context for log lines.

Identifies which service instance wrote a log line so that logs from several
local processes (or containers) can be told apart.
"""

from functools import lru_cache
import os


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'campus-events')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')
    hostname = os.getenv('HOSTNAME', '')

    # Container hostnames are long hashes; the first 8 chars are enough to tell them apart
    instance = hostname[:8] if hostname else str(os.getpid())
    return f'{service_name}@{deploy_env}:{instance}'
