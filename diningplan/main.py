import uvicorn
from diningplan.api.api_run import app
from diningplan.utilities.config import APP_HOST, APP_PORT


if __name__ == "__main__":
    # Print a friendly message that points to the URL you can open in a browser
    print(f"Meal planner API on http://localhost:{APP_PORT}/docs (Press CTRL+C to quit)")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT)
