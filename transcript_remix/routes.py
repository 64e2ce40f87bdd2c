import logging

from flask import Blueprint, current_app, jsonify, render_template, request
from werkzeug.exceptions import HTTPException

from .captions import fetch_transcript
from .errors import MissingInput, TranscriptRemixError
from .formatting import format_transcript
from .prompts import NOTES, REMIX, SUMMARY, TASKS
from .video_id import STRICT_URL_PATTERN, extract_video_id

logger = logging.getLogger(__name__)

bp = Blueprint("transcript_remix", __name__, template_folder="templates")


def _services():
    return current_app.extensions["transcript_remix"]


def _json_body():
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


@bp.app_errorhandler(TranscriptRemixError)
def handle_remix_error(error):
    return jsonify({"error": error.message}), error.status_code


@bp.app_errorhandler(Exception)
def handle_unexpected_error(error):
    if isinstance(error, HTTPException):
        return error
    logger.exception("Unhandled error on %s", request.path)
    return jsonify({"error": TranscriptRemixError.default_message}), 500


@bp.route("/")
def index():
    return render_template(
        "index.html", tasks=list(TASKS.values()), url_pattern=STRICT_URL_PATTERN.pattern
    )


@bp.route("/transcript", methods=["POST"])
def transcript():
    url = _json_body().get("url")
    if not url or not isinstance(url, str) or not url.strip():
        raise MissingInput("URL is required")

    video_id = extract_video_id(url)
    text = fetch_transcript(video_id, _services().caption_provider)
    return jsonify({"transcript": text})


@bp.route("/paragraphs", methods=["POST"])
def paragraphs():
    text = _json_body().get("transcript")
    if not text or not isinstance(text, str):
        raise MissingInput()
    return jsonify({"paragraphs": format_transcript(text)})


def _generate(task):
    data = _json_body()
    result = _services().generation.generate(
        task, data.get("transcript"), data.get("systemPrompt")
    )
    return jsonify({task.response_key: result})


@bp.route("/summary", methods=["POST"])
def summary():
    return _generate(SUMMARY)


@bp.route("/remix", methods=["POST"])
def remix():
    return _generate(REMIX)


@bp.route("/notes", methods=["POST"])
def notes():
    return _generate(NOTES)
