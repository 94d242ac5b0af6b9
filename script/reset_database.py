#!/usr/bin/env python3
"""
Database Reset Script
Reset the ledger schema

Features:
1. Drop every ledger table (movie, showtime, booking)
2. Recreate them from the ORM models

Notes:
- This script only resets database structure, does not seed test data
- To seed test data, run `python -m script.seed_data`
"""

import asyncio

from src.platform.config.di import container
from src.platform.database.orm_db_setting import Base, Database, create_db_and_tables


async def drop_all_tables(database: Database) -> None:
    async with database.engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    print(f'   ✅ Dropped tables: {", ".join(sorted(Base.metadata.tables))}')


async def main():
    print('🔄 Starting database reset...')
    print('=' * 50)

    database = container.database()
    print(f'Database URL: {database.url}')

    try:
        print('🗑️ Dropping tables...')
        await drop_all_tables(database)

        print('🏗️ Creating tables...')
        await create_db_and_tables(database)
        print('   ✅ Tables created')

        print('=' * 50)
        print('✅ Database reset completed!')
        print('💡 To seed test data, run: python -m script.seed_data')

    except Exception as e:
        print(f'❌ Reset failed: {e}')
        exit(1)
    finally:
        await database.dispose()


if __name__ == '__main__':
    asyncio.run(main())
