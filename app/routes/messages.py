from flask import Blueprint, request, jsonify
import json
import logging
import random
import re
from app.errors import StoreError
from app.utils import get_store, plain_error

logger = logging.getLogger(__name__)

messages_bp = Blueprint('messages', __name__, url_prefix='/v1/message')

NOT_FOUND = '404 page not found'

# plain ascii integers that fit in 64 bits
INDEX_RE = re.compile(r'[+-]?[0-9]+')
MAX_INDEX = 2**63 - 1


@messages_bp.route('/', methods=['GET', 'POST'])
def message_handler():
    if request.method == 'POST':
        return add_message()
    return get_all_messages()


def get_all_messages():
    try:
        messages = get_store().read()
    except StoreError as e:
        logger.error("Reading messages failed: %s", e)
        return plain_error(str(e), 500)
    return jsonify(messages), 200


def add_message():
    body = request.get_data(as_text=True)
    try:
        motd = json.loads(body)
    except ValueError as e:
        return plain_error(str(e), 400)

    if not isinstance(motd, str):
        return plain_error('message must be a JSON string', 400)

    try:
        get_store().add(motd)
    except StoreError as e:
        logger.error("Adding message failed: %s", e)
        return plain_error(str(e), 500)
    return '', 201


@messages_bp.route('/random', methods=['GET'])
def get_random_message():
    try:
        messages = get_store().read()
    except StoreError as e:
        logger.error("Reading messages failed: %s", e)
        return plain_error(str(e), 500)

    if not messages:
        return '', 204

    ix = random.randrange(len(messages))
    return jsonify(messages[ix]), 200


@messages_bp.route('/<index>', methods=['GET'])
def get_one_message(index):
    # bad ids never touch the store
    if not INDEX_RE.fullmatch(index):
        return plain_error(NOT_FOUND, 404)
    i = int(index)
    if i < 0 or i > MAX_INDEX:
        return plain_error(NOT_FOUND, 404)

    try:
        messages = get_store().read()
    except StoreError as e:
        logger.error("Reading messages failed: %s", e)
        return plain_error(str(e), 500)

    if i >= len(messages):
        return plain_error(NOT_FOUND, 404)
    return jsonify(messages[i]), 200
