import argparse
import logging
import sys

from pydantic import ValidationError

from .config import ClientConfig, TrustPolicy
from .errors import GeminiError
from .gemtext import Gemtext
from .geminipy import GeminiClient


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="geminipy", description="Fetch a page over the gemini protocol.")

    parser.add_argument("url", help="The URL to request (e.g., gemini://geminiprotocol.net/).")
    parser.add_argument("--timeout", type=float, default=None, help="Connect timeout in seconds.")
    parser.add_argument("--verify", action="store_true", help="Validate the server certificate instead of accepting any.")
    parser.add_argument("--html", action="store_true", help="Render text/gemini bodies as HTML.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")

    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        config = ClientConfig(
            timeout=args.timeout,
            trust_policy=TrustPolicy.VERIFY if args.verify else TrustPolicy.ACCEPT_ANY,
        )
        response = GeminiClient(config).request(args.url)

        if not response.status.is_success:
            print(f"{response.status} {response.meta}", file=sys.stderr)
            return 1

        body = response.body or b""
        if args.html and response.meta.startswith("text/gemini"):
            print(Gemtext.parse(body.decode("utf-8")).to_html(), end="")
        else:
            sys.stdout.buffer.write(body)
            sys.stdout.flush()
    except GeminiError as e:
        sys.exit(f"An error occurred: {e}")
    except ValidationError as e:
        sys.exit(f"Invalid configuration: {e}")
    except UnicodeDecodeError as e:
        sys.exit(f"Failed to decode body as utf-8: {e}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
