"""Flask web application for the Chinese Name Generator.

Serve with a WSGI server via the factory, e.g. ``gunicorn "app:create_app()"``.
"""

import logging
import os

from flask import Flask, jsonify, request

from config import LOG_LEVEL, Settings, load_settings
from hanname.models import NameProfile
from hanname.services import (
    AnswerParseError,
    ChatCompletionService,
    LLMServiceError,
    NameService,
)
from hanname.services.prompt_builder import FORM_OPTIONS

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, llm_service=None) -> Flask:
    """Create the Flask app.

    Settings are read from the environment once, here, unless given.
    ``llm_service`` replaces the chat-completion gateway (useful for testing).
    """
    if settings is None:
        settings = load_settings()
    if llm_service is None:
        llm_service = ChatCompletionService(settings)

    app = Flask(__name__)
    app.json.ensure_ascii = False
    name_service = NameService(llm_service=llm_service)

    @app.route('/api/options', methods=['GET'])
    def api_options():
        """Return the option catalogs rendered by the name form."""
        return jsonify(FORM_OPTIONS)

    @app.route('/api/generate-name', methods=['POST'])
    def api_generate_name():
        """Generate a Chinese name from the submitted profile."""
        if not settings.api_key:
            return jsonify({'error': 'DeepSeek API key is not configured on the server'}), 500

        # Body is parsed regardless of Content-Type
        data = request.get_json(force=True, silent=True)
        if not isinstance(data, dict):
            return jsonify({'error': 'Invalid request data'}), 400

        profile = NameProfile.from_dict(data)
        if not profile.english_name:
            return jsonify({'error': 'English name is required'}), 400

        try:
            suggestion = name_service.generate(profile)
        except (LLMServiceError, AnswerParseError) as e:
            logger.warning("[api] generate-name failed: %s", e)
            return jsonify(e.to_dict()), e.status_code
        except Exception:
            logger.exception("[api] generate-name error")
            return jsonify({'error': 'Unexpected error while generating the name'}), 500

        return jsonify(suggestion.to_dict())

    return app


if __name__ == '__main__':
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # Make sure DEEPSEEK_API_KEY is set
    if not load_settings().api_key:
        print("Warning: DEEPSEEK_API_KEY or NEXT_PUBLIC_DEEPSEEK_API_KEY environment variable not set")

    port = int(os.environ.get('PORT', 5000))
    app = create_app()
    app.run(debug=False, host='0.0.0.0', port=port)
