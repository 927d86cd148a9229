#!/usr/bin/env python
"""
Tourlicity Application Entry Point.
Run this file to start the development server.
"""
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from tourlicity import create_app  # noqa: E402

# Create application instance
app = create_app(os.environ.get('FLASK_ENV', 'development'))

if __name__ == '__main__':
    host = os.environ.get('FLASK_HOST', '127.0.0.1')
    port = int(os.environ.get('FLASK_PORT', 5000))
    debug = os.environ.get('FLASK_DEBUG', 'false').lower() == 'true'

    print(f"Tourlicity running on http://{host}:{port} "
          f"(environment: {os.environ.get('FLASK_ENV', 'development')}, debug: {debug})")

    app.run(host=host, port=port, debug=debug)
