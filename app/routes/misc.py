from flask import Blueprint, current_app, jsonify, send_from_directory

misc_bp = Blueprint('misc', __name__)

@misc_bp.route('/', methods=['GET'])
def index():
    return send_from_directory(current_app.static_folder, 'index.html')

@misc_bp.route('/api/ping', methods=['GET'])
def ping():
    return jsonify({'message': 'pong'}), 200
