import asyncio
import sys
from pathlib import Path
from datetime import datetime

# Add the repository root to sys.path to allow importing healthsync
repo_dir = Path(__file__).parent.parent
sys.path.append(str(repo_dir))

from sqlalchemy import select

from healthsync.config.constants import Gender, Role, VerificationStatus
from healthsync.config.settings import settings
from healthsync.core.auth import get_password_hash
from healthsync.db.base import get_engine, get_session_factory
from healthsync.db.models.doctor import DoctorModel
from healthsync.db.models.user import UserModel

DEFAULT_PASSWORD = "TestPassword1!"

# email, first name, last name, specialization, license, gender, date of birth, phone
DOCTORS = [
    ("dr.smith@example.com", "John", "Smith", "Cardiology", "MD-100201", Gender.MALE, "1975-05-15", "123-456-7890"),
    ("dr.house@example.com", "Gregory", "House", "Diagnostic Medicine", "MD-100202", Gender.MALE, "1965-06-11", "123-456-7892"),
    ("dr.chen@example.com", "Mei", "Chen", "Neurology", "MD-100203", Gender.FEMALE, "1985-03-25", "123-456-7893"),
    ("dr.brown@example.com", "Sarah", "Brown", "Pediatrics", "MD-100204", Gender.FEMALE, "1978-12-05", "123-456-7895"),
    ("dr.taylor@example.com", "Emily", "Taylor", "Dermatology", "MD-100205", Gender.FEMALE, "1992-01-30", "123-456-7897"),
    ("dr.allen@example.com", "Olivia", "Allen", "Psychiatry", "MD-100206", Gender.FEMALE, "1986-06-06", "123-456-7803"),
    ("dr.young@example.com", "Christopher", "Young", "Endocrinology", "MD-100207", Gender.MALE, "1981-03-03", "123-456-7804"),
    ("dr.baker@example.com", "Sophia", "Baker", "Pulmonology", "MD-100208", Gender.FEMALE, "1987-08-08", "123-456-7809"),
]

async def main() -> None:
    print("Connecting to database at:", settings.database_url)
    engine = await get_engine(str(settings.database_url))
    async_session = await get_session_factory(engine)

    async with async_session() as db:
        for email, first_name, last_name, specialization, license_number, gender, dob, phone in DOCTORS:
            dob_date = datetime.strptime(dob, "%Y-%m-%d").date()

            # soft-deleted accounts still own their email
            existing_user = await db.execute(
                select(UserModel.id)
                .where(UserModel.email == email)
                .execution_options(include_deleted=True)
            )
            if existing_user.first() is not None:
                print(f"Doctor with email {email} already exists. Skipping.")
                continue

            user = UserModel(
                email=email,
                password_hash=get_password_hash(DEFAULT_PASSWORD),
                role=Role.DOCTOR,
                first_name=first_name,
                last_name=last_name,
                gender=gender,
                date_of_birth=dob_date,
                phone_number=phone,
                is_verified=True,
            )
            user.doctor_profile = DoctorModel(
                specialization=specialization,
                license_number=license_number,
                verification_status=VerificationStatus.VERIFIED,
            )
            db.add(user)
            print(f"Added doctor: {first_name} {last_name} ({email}), specialization: {specialization}")

        await db.commit()
        print("Doctors successfully added to the database.")

    await engine.dispose()

if __name__ == "__main__":
    asyncio.run(main())
