"""Command-line interface for the Eden AI client.

WHY: Trying a provider or checking an API key should not require writing
a script. The CLI wires argument parsing to the audio and OCR resources
behind three subcommands.

HOW: Uses argparse with subcommands (tts, stt, ocr). Each subcommand
builds the matching request model, sends it through one ApiClient, and
prints the result. Status messages go to stderr; results go to stdout
(or to --output for synthesized audio).

RULES:
- --provider is repeatable; at least one is required
- --api-key / --base-url override EDENAI_API_KEY / EDENAI_BASE_URL; the
  base URL falls back to the public endpoint when neither is set
- Any EdenAIError or invalid input exits with code 1 and a one-line message
- --verbose enables INFO logging (request lines, retries)
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from edenai_client.api.client import ApiClient
from edenai_client.config import BASE_URL_ENV, DEFAULT_BASE_URL, env_value
from edenai_client.enums import ServiceProvider, VoiceOption
from edenai_client.exceptions import EdenAIError, ValidationError
from edenai_client.files import FileSource
from edenai_client.middleware import RequestLoggingMiddleware
from edenai_client.models.audio import SpeechToTextAsyncRequest, TextToSpeechRequest
from edenai_client.models.ocr import OcrAsyncRequest, OcrRequest
from edenai_client.resources.audio import AudioResource
from edenai_client.resources.ocr import OcrResource


def _status(msg: str) -> None:
    """Print a status message to stderr."""
    print(msg, file=sys.stderr, flush=True)


def _make_client(args: argparse.Namespace) -> ApiClient:
    base_url = args.base_url or env_value(BASE_URL_ENV) or DEFAULT_BASE_URL
    middleware = [RequestLoggingMiddleware()] if args.verbose else []
    return ApiClient(base_url=base_url, api_key=args.api_key, middleware=middleware)


def _providers(args: argparse.Namespace) -> List[ServiceProvider]:
    return [ServiceProvider(p) for p in args.provider]


def _run_tts(client: ApiClient, args: argparse.Namespace) -> None:
    request = TextToSpeechRequest.make(
        text=args.text,
        providers=_providers(args),
        option=VoiceOption(args.voice),
        language=args.language,
        audio_format=args.audio_format,
    )
    _status("Synthesizing {} characters...".format(len(args.text)))
    result = AudioResource(client).text_to_speech(request)
    if not result.audio_data:
        raise ValidationError("Provider returned no audio")

    output = Path(args.output)
    output.write_bytes(result.audio_data)
    _status("Saved {} bytes to {}".format(len(result.audio_data), output))


def _run_stt(client: ApiClient, args: argparse.Namespace) -> None:
    request = SpeechToTextAsyncRequest(
        file=args.file,
        providers=_providers(args),
        language=args.language,
        speakers=args.speakers,
    )
    _status("Uploading {}...".format(Path(args.file).name))
    job = AudioResource(client).speech_to_text_async(request)
    _status("Transcription job submitted.")
    print(job.job_id)


def _run_ocr(client: ApiClient, args: argparse.Namespace) -> None:
    if args.source.startswith(("http://", "https://")):
        source = FileSource.from_url(args.source)
    else:
        source = FileSource.from_path(args.source)

    resource = OcrResource(client)
    if args.use_async:
        job = resource.ocr_async(OcrAsyncRequest(source, _providers(args), args.language))
        _status("OCR job submitted.")
        print(job.public_id)
        return

    response = resource.ocr(OcrRequest(source, _providers(args), args.language))
    for result in response.results:
        if result.error:
            _status("[{}] error: {}".format(result.provider, result.error))
            continue
        print("[{}]".format(result.provider))
        print(result.text)


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable: tests can inspect the parser without sending requests.
    """
    parser = argparse.ArgumentParser(
        prog="edenai",
        description="Call Eden AI audio and OCR endpoints from the command line.",
    )
    parser.add_argument("--api-key", default=None, help="API key (default: $EDENAI_API_KEY).")
    parser.add_argument("--base-url", default=None, help="API base URL (default: $EDENAI_BASE_URL).")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log requests and retries.")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--provider",
        action="append",
        required=True,
        choices=[p.value for p in ServiceProvider],
        help="Provider to use. Can be specified multiple times.",
    )
    common.add_argument("--language", default="en", help="Language code (default: %(default)s).")

    sub = parser.add_subparsers(dest="command", required=True)

    tts = sub.add_parser("tts", parents=[common], help="Synthesize speech from text.")
    tts.add_argument("text", help="Text to speak.")
    tts.add_argument("-o", "--output", default="speech.mp3", help="Output file (default: %(default)s).")
    tts.add_argument(
        "--voice",
        default=VoiceOption.FEMALE.value,
        choices=[v.value for v in VoiceOption],
        help="Voice option (default: %(default)s).",
    )
    tts.add_argument("--audio-format", default=None, help="Audio format, e.g. mp3 or wav.")
    tts.set_defaults(handler=_run_tts)

    stt = sub.add_parser("stt", parents=[common], help="Submit an audio file for transcription.")
    stt.add_argument("file", help="Audio file (mp3, wav, flac, ogg).")
    stt.add_argument("--speakers", type=int, default=None, help="Expected number of speakers.")
    stt.set_defaults(handler=_run_stt)

    ocr = sub.add_parser("ocr", parents=[common], help="Extract text from an image or URL.")
    ocr.add_argument("source", help="Image path or http(s) URL.")
    ocr.add_argument("--async", dest="use_async", action="store_true", help="Submit an async job.")
    ocr.set_defaults(handler=_run_ocr)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        with _make_client(args) as client:
            args.handler(client, args)
    except (EdenAIError, ValueError) as e:
        print("Error: {}".format(e), file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        _status("\nCancelled by user.")
        sys.exit(130)


if __name__ == "__main__":
    main()
