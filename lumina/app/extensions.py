from flask_cors import CORS

# Singletons (initialized in app factory)
cors = CORS()

# Key under app.extensions holding the shared read-only CatalogIndex
CATALOG_KEY = "lumina.catalog"
