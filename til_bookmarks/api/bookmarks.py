from flask import request
from flask_restx import Namespace, Resource
from ..errors import BookmarkValidationError
from ..models.api_models import create_models
from ..utils.status import error_response, status_message
import logging

bookmarks_ns = Namespace('bookmarks', description='Bookmark operations')

form_model, bookmark_model, _ = create_models(bookmarks_ns)
logger = logging.getLogger(__name__)

@bookmarks_ns.route('/')
class BookmarkList(Resource):
    @bookmarks_ns.doc('list_bookmarks',
        description='List seed and user bookmarks, newest first, optionally filtered.',
        params={'search': 'Case-insensitive text to look for in title, note, tags and host',
                'tag': 'Only bookmarks carrying this exact tag'},
        responses={
            200: 'Success. Returns the matching bookmarks.',
            500: 'Server error. An error occurred while fetching bookmarks.'
        })
    @bookmarks_ns.marshal_list_with(bookmark_model)
    def get(self):
        """List bookmarks"""
        search = request.args.get('search', '')
        tag = request.args.get('tag', '')
        bookmarks = bookmarks_ns.bookmark_service.search_bookmarks(search=search, tag=tag)
        return [b.to_dict() for b in bookmarks], 200

    @bookmarks_ns.doc('add_bookmark',
        description='Save a bookmark from the form fields.',
        responses={
            201: 'Bookmark saved.',
            400: 'Bad request. Title or URL missing or invalid.'
        })
    @bookmarks_ns.expect(form_model)
    def post(self):
        """Add a new bookmark"""
        data = request.get_json(silent=True) or {}
        try:
            bookmark = bookmarks_ns.bookmark_service.add_bookmark(data)
        except BookmarkValidationError as e:
            return error_response(str(e), 400)
        logger.info(f"Saved bookmark {bookmark.id} ({bookmark.url_type})")
        return {'bookmark': bookmark.to_dict(), 'status': status_message('Bookmark saved!', 'success')}, 201

@bookmarks_ns.route('/tags')
class TagList(Resource):
    @bookmarks_ns.doc('list_tags',
        description='All tags used by any bookmark, sorted.',
        responses={200: 'Success. Returns the tag list.'})
    def get(self):
        """List all tags"""
        return {'tags': bookmarks_ns.bookmark_service.get_tags()}, 200
