import os
from datetime import datetime, timezone

from flask import Blueprint, Flask, current_app, jsonify, request

from hope_chatbot import Chatbot, load_settings
from hope_chatbot.chat_log import ChatLog
from hope_chatbot.logger import logger

chatbot_api = Blueprint("chatbot", __name__, url_prefix="/api/chatbot")


def _chatbot():
    return current_app.extensions["chatbot"]


def _chat_log():
    return current_app.extensions["chat_log"]


def _server_error(e):
    return jsonify({
        'success': False,
        'message': 'Internal server error',
        'error': str(e) if current_app.debug else None
    }), 500


# ---------------- ROUTES ----------------
@chatbot_api.route('/chat', methods=['POST'])
def chat():
    """Classify a message and return the canned reply"""
    try:
        data = request.get_json(silent=True) or {}
        message = data.get('message') if isinstance(data, dict) else None

        if not isinstance(message, str) or not message.strip():
            return jsonify({
                'success': False,
                'message': 'Message is required and must be a non-empty string'
            }), 400

        message = message.strip()
        logger.info("💬 Chat request: %r", message)

        result = _chatbot().process_message(message)
        logger.info("🤖 Response: %s (confidence: %.3f)", result.intent, result.confidence)
        _chat_log().record(message, result)

        return jsonify({'success': True, 'data': result.to_dict()})
    except Exception as e:
        logger.exception("❌ Chat controller error")
        return _server_error(e)


@chatbot_api.route('/status', methods=['GET'])
def status():
    """Index state and available intents"""
    state = _chatbot().get_status()
    return jsonify({
        'success': True,
        'data': {
            'initialized': state['initialized'],
            'vocabularySize': state['vocabulary_size'],
            'trainingDocuments': state['training_document_count'],
            'availableIntents': state['available_intents'],
            'timestamp': datetime.now(timezone.utc).isoformat()
        }
    })


@chatbot_api.route('/initialize', methods=['POST'])
def initialize():
    """Rebuild the index from the training corpus"""
    if _chatbot().initialize():
        return jsonify({'success': True, 'message': 'Chatbot initialized successfully'})
    return jsonify({'success': False, 'message': 'Failed to initialize chatbot'}), 500


@chatbot_api.route('/stats', methods=['GET'])
def stats():
    """Summary of recent chat interactions"""
    return jsonify({'success': True, 'data': _chat_log().summary()})


def create_app(chatbot=None, settings=None, chat_log=None):
    """Flask app serving the chatbot API.

    Without an explicit chatbot one is built from settings and initialized
    strictly, so a broken corpus stops startup.
    """
    settings = settings or load_settings()

    if chatbot is None:
        chatbot = Chatbot(settings=settings)
        chatbot.initialize(raise_on_error=True)
    if chat_log is None:
        chat_log = ChatLog(settings.chat_log_file, settings.chat_history_size)

    app = Flask(__name__)
    app.config['DEBUG'] = settings.debug
    app.extensions['chatbot'] = chatbot
    app.extensions['chat_log'] = chat_log
    app.register_blueprint(chatbot_api)
    return app


# ---------------- START ----------------
if __name__ == '__main__':
    config_file = os.environ.get('HOPE_CHATBOT_CONFIG') or ('config.yaml' if os.path.exists('config.yaml') else None)
    settings = load_settings(config_file)

    print("\n" + "=" * 50)
    print("MWALIMU HOPE FOUNDATION CHATBOT")
    print("=" * 50)

    app = create_app(settings=settings)

    print("\n📊 Access Points:")
    print(f"  • Chat API: http://localhost:{settings.port}/api/chatbot/chat")
    print(f"  • Status: http://localhost:{settings.port}/api/chatbot/status")
    print(f"  • Stats: http://localhost:{settings.port}/api/chatbot/stats")

    print("\n--- Flask Server Running ---\n")
    app.run(debug=settings.debug, host=settings.host, port=settings.port)
