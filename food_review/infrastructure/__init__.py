# Infrastructure Layer
# ====================
# Contains all external integrations:
# - persistence/: SQLite review and dictionary stores
# - importer/: CSV/Excel seeding of the stores
# - config/: Environment and settings management
#
# This layer can be replaced entirely without affecting domain/application layers.
