from taskmanagement.main import app
from taskmanagement.db.init import init_db
from mangum import Mangum

# Lifespan is off under Mangum, so the startup hook never fires here
init_db()

# ASGI handler for serverless deployment
handler = Mangum(app, lifespan="off")

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
