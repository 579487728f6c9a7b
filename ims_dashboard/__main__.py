"""
Run the dashboard with uvicorn: python -m ims_dashboard
"""

import uvicorn

from ims_dashboard.config import get_settings
from ims_dashboard.web.app import create_app


def main():
    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
