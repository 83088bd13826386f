"""
VYRA Stylist Server
Run the Flask page and REST API for the AI stylist.
Usage:
    python main.py
    python main.py --port 8000
    python main.py --debug
"""

import argparse
import sys
from Stylist.Routes.StyleRoute import CreateApp

# Module-level app so Gunicorn can find it
app = CreateApp()


def describe_endpoints(host, port):
    """List the registered routes as printable lines, e.g. "POST http://host:port/api/generate-outfits"."""
    lines = []
    for rule in sorted(app.url_map.iter_rules(), key=lambda r: r.rule):
        if rule.endpoint == "static":
            continue
        for method in sorted(rule.methods - {"HEAD", "OPTIONS"}):
            lines.append(f"  {method:<4} http://{host}:{port}{rule.rule}")
    return lines


def main():
    """Parse arguments and start the server."""
    parser = argparse.ArgumentParser(
        description="VYRA AI Stylist Server",
        epilog="""
            Examples:
            python main.py                    # Start on port 5000
            python main.py --port 8000        # Start on port 8000
            python main.py --host 127.0.0.1   # Start on localhost only
            python main.py --debug            # Start in debug mode
        """
    )
    parser.add_argument(
        '--port',
        type=int,
        default=5000,
        help='Port to run the server on (default: 5000)'
    )
    parser.add_argument(
        '--host',
        default='0.0.0.0',
        help='Host to bind to (default: 0.0.0.0)'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Run in debug mode'
    )

    args = parser.parse_args()

    print(f"\n{'='*60}")
    print("VYRA AI Stylist")
    print(f"{'='*60}")
    print(f"Server starting on http://{args.host}:{args.port}")
    print(f"Debug mode: {args.debug}")
    print("\nEndpoints:")
    for line in describe_endpoints(args.host, args.port):
        print(line)
    print(f"{'='*60}\n")

    try:
        app.run(
            host=args.host,
            port=args.port,
            debug=args.debug,
            use_reloader=args.debug
        )
    except KeyboardInterrupt:
        print("\n\nServer stopped by user")
        sys.exit(0)


if __name__ == '__main__':
    main()
