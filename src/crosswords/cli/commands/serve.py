"""Serve command."""


def add_subparser(subparsers):
    parser = subparsers.add_parser("serve", help="Run the API server")
    parser.add_argument("--host", default="127.0.0.1", help="Bind address")
    parser.add_argument("--port", type=int, default=8000, help="Port")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    parser.set_defaults(func=run_serve)


def run_serve(args):
    import uvicorn

    uvicorn.run("crosswords.server.main:app", host=args.host, port=args.port, reload=args.reload)
