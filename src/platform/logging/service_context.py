"""
Service identification for log lines.

Every record is prefixed with `<service>@<env>:<instance>` so that lines from
several API replicas can be told apart once they land in one log stream.
"""

import os
from functools import lru_cache


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'cinema-booking')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')

    # Container runtimes set HOSTNAME to the container id, locally fall back to the PID
    instance = os.getenv('HOSTNAME', '')[:12] or str(os.getpid())
    return f'{service_name}@{deploy_env}:{instance}'
