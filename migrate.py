from slidr.database.database import create_tables


def migrate():
    print("Création des tables (users, projects)...")
    create_tables()
    print("Migration terminée avec succès!")


if __name__ == "__main__":
    migrate()
