from aham.core.database import Base, engine, init_db


def reset_database():
    print("⚠️ Dropping all tables...")
    Base.metadata.drop_all(bind=engine)

    print("🚀 Recreating tables...")
    init_db(engine)
    print("✅ Tables recreated successfully.")


if __name__ == "__main__":
    reset_database()
