#!/usr/bin/env python3
"""
Database Reset Script
Reset the database schema through Alembic

Features:
1. Downgrade to base - drop every table created by the migrations
2. Upgrade to head - recreate the latest schema

Notes:
- This script only resets database structure, does not seed data
- To seed demo data, run `python script/seed_data.py`
"""

import subprocess

from sqlalchemy.engine import make_url

from src.platform.config.core_setting import settings
from src.platform.constant.path import BASE_DIR


def _run_alembic(*args: str) -> None:
    command = ['alembic', *args]
    print(f"   🔄 Running '{' '.join(command)}'...")

    result = subprocess.run(command, cwd=BASE_DIR, capture_output=True, text=True)

    if result.returncode != 0:
        print(f'   ❌ Migration failed (return code: {result.returncode})')
        if result.stdout:
            print(f'   📋 STDOUT: {result.stdout}')
        if result.stderr:
            print(f'   📋 STDERR: {result.stderr}')
        raise RuntimeError(f'alembic {" ".join(args)} failed with return code {result.returncode}')

    print('   ✅ Done')


def main():
    print('🔄 Starting database reset...')
    print('=' * 50)
    print(f'Database URL: {make_url(settings.DATABASE_URL_ASYNC).render_as_string(hide_password=True)}')

    try:
        print('🗑️ Dropping schema...')
        _run_alembic('downgrade', 'base')

        print('🏗️ Running database migrations...')
        _run_alembic('upgrade', 'head')

        print('=' * 50)
        print('✅ Database reset completed!')
        print('💡 To seed demo data, run: python script/seed_data.py')

    except RuntimeError as e:
        print(f'❌ Reset failed: {e}')
        exit(1)


if __name__ == '__main__':
    main()
