# Presentation Layer
# ==================
# FastAPI routes and the HTML renderer.
