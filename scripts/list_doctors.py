"""
Print the doctor directory.

    python scripts/list_doctors.py [specialization] [--verified]
"""
import asyncio
import sys
from pathlib import Path

# Add the repository root to sys.path to allow importing healthsync
repo_dir = Path(__file__).parent.parent
sys.path.append(str(repo_dir))

from healthsync.config.settings import settings
from healthsync.db.base import get_engine, get_session_factory
from healthsync.db.crud.doctor import find_doctors


async def main(specialization=None, verified_only=False) -> None:
    print("Connecting to database at:", settings.database_url)
    engine = await get_engine(str(settings.database_url))
    session_factory = await get_session_factory(engine)

    try:
        async with session_factory() as db:
            doctors = await find_doctors(
                db, specialization=specialization, verified_only=verified_only, limit=1000
            )
    finally:
        await engine.dispose()

    if not doctors:
        print("No doctors match.")
        return

    print(f"{len(doctors)} doctor(s):")
    print(f"{'ID':<38} {'Name':<25} {'Specialization':<22} {'License':<12} {'Status':<10}")
    for doctor in doctors:
        print(
            f"{str(doctor.id):<38} {doctor.user.full_name:<25} {doctor.specialization:<22} "
            f"{doctor.license_number:<12} {doctor.verification_status.value:<10}"
        )


if __name__ == "__main__":
    args = [a for a in sys.argv[1:] if a != "--verified"]
    asyncio.run(main(args[0] if args else None, "--verified" in sys.argv))
