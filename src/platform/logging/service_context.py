"""
Service context extraction for distributed logging.

Identifies the running process in log lines so that output from several
workers or containers can be told apart.
"""

import os
from functools import lru_cache


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'webinar-service')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')

    # Container hostname when running in docker/k8s, PID otherwise
    instance = os.getenv('HOSTNAME', '')[:12] or str(os.getpid())

    return f'{service_name}@{deploy_env}:{instance}'
