"""
AWS Lambda handler — Mangum wrapper for the Propper FastAPI app.
"""

from mangum import Mangum

from propper.main import app

handler = Mangum(app, lifespan="off")
