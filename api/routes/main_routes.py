"""
Main routes: the artist listing with search and member-count filters
"""
from flask import Blueprint, request

from ..errors import MethodError


def create_main_blueprint(artist_service, renderer):
    """Build the listing blueprint around the given service and renderer"""
    main_bp = Blueprint('main', __name__)

    @main_bp.route('/', methods=['GET'], provide_automatic_options=False)
    def index():
        """Artist listing, optionally filtered by ?q= and ?members="""
        # Werkzeug routes HEAD to GET views
        if request.method != 'GET':
            raise MethodError("Method Not Allowed")

        page = artist_service.build_index_page(
            query=request.args.get('q', ''),
            members_filter=request.args.get('members', ''))

        return renderer.render('index.html',
                               failure_message="Failed to render template",
                               page=page)

    return main_bp
