import os
import logging
from flask import Flask, request, jsonify, current_app
from flask_cors import CORS
from werkzeug.exceptions import HTTPException, RequestEntityTooLarge

# Import configuration and processing functions
from config import UPLOAD_FOLDER, API_HOST, API_PORT, API_DEBUG, MAX_FILE_SIZE, LOG_LEVEL
from ai_processor import process_document, get_llm
from errors import AnalysisError, FileTooLarge
from store import InMemoryResultStore
from utils import validate_document_file, get_upload_filename, safe_file_cleanup, log_error_and_return

# Setup logging
logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))
logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Failed to analyze document."


def _get_llm():
    """Returns the injected chat model, building the configured one on first use."""
    llm = current_app.extensions.get("analysis_llm")
    if llm is None:
        llm = get_llm()
        current_app.extensions["analysis_llm"] = llm
    return llm


def create_app(store=None, llm=None, upload_folder=UPLOAD_FOLDER):
    """
    Creates the Flask application.

    Args:
        store: ResultStore holding analyses (a fresh in-memory store by default)
        llm: Chat model used for analysis (built from configuration on first request by default)
        upload_folder: Directory for temporary uploads
    """
    app = Flask(__name__)
    CORS(app)  # Cross-Origin Resource Sharing configuration for frontend compatibility

    # File upload directory configuration
    os.makedirs(upload_folder, exist_ok=True)
    app.config['UPLOAD_FOLDER'] = upload_folder
    app.config['MAX_CONTENT_LENGTH'] = MAX_FILE_SIZE

    app.extensions["result_store"] = store if store is not None else InMemoryResultStore()
    app.extensions["analysis_llm"] = llm

    # --- API ENDPOINTS ---

    @app.route('/api/analyze', methods=['POST'])
    def analyze_document():
        """
        Handles PDF/DOCX upload, runs the analysis pipeline and returns the new doc_id.
        """
        filepath = None

        try:
            file = request.files.get('document')
            mime_type = validate_document_file(file)

            # Save file under a unique name so concurrent uploads never collide
            filepath = os.path.join(app.config['UPLOAD_FOLDER'], get_upload_filename(file.filename))
            file.save(filepath)

            logger.info(f"Processing document: {file.filename} ({mime_type})")

            doc_id = process_document(filepath, mime_type, app.extensions["result_store"], _get_llm())
            return jsonify({"doc_id": doc_id}), 200

        except AnalysisError as e:
            body, status_code = log_error_and_return(e)
            return jsonify(body), status_code

        except RequestEntityTooLarge:
            body, status_code = log_error_and_return(
                FileTooLarge(details={"max_bytes": app.config['MAX_CONTENT_LENGTH']})
            )
            return jsonify(body), status_code

        except HTTPException:
            raise

        except Exception:
            logger.exception("Document analysis failed")
            return jsonify({"error": GENERIC_ERROR_MESSAGE}), 500

        finally:
            # Temporary file cleanup
            if filepath:
                safe_file_cleanup(filepath)

    @app.route('/api/results/<doc_id>', methods=['GET'])
    def get_results(doc_id):
        """
        Returns the stored analysis for a doc_id from a previous /api/analyze call.
        """
        try:
            analysis = app.extensions["result_store"].get(doc_id)
            return jsonify(analysis), 200

        except AnalysisError as e:
            body, status_code = log_error_and_return(e)
            return jsonify(body), status_code

    logger.info("Flask application initialized")
    return app


app = create_app()

# --- RUN THE APP ---
if __name__ == '__main__':
    # Application server configuration
    logger.info(f"Starting Legal Document Analyzer API on {API_HOST}:{API_PORT}")
    app.run(host=API_HOST, port=API_PORT, debug=API_DEBUG)
