from flask import Response, request
from flask_restx import Namespace, Resource
from ..errors import ImportRejectedError, OperationInProgressError
from ..services.interchange import export_filename
from ..utils.status import error_response, status_message
import asyncio
import logging

transfer_ns = Namespace('transfer', description='Import and export of personal bookmarks')
logger = logging.getLogger(__name__)

@transfer_ns.route('/import')
class ImportBookmarks(Resource):
    @transfer_ns.doc('import_bookmarks',
        description='Import a JSON array of bookmarks, sent as the request body or as a "file" upload. '
                    'Imported bookmarks replace saved ones with the same id.',
        responses={
            200: 'Bookmarks imported.',
            400: 'Bad request. The payload is not a JSON array.',
            409: 'Another import is still running.',
            422: 'The payload contained no valid bookmarks.'
        })
    def post(self):
        """Import bookmarks"""
        service = transfer_ns.bookmark_service
        upload = request.files.get('file')

        try:
            with transfer_ns.in_flight.claim('import'):
                if upload is not None:
                    loop = asyncio.new_event_loop()
                    try:
                        result = loop.run_until_complete(service.import_file(upload.stream))
                    finally:
                        loop.close()
                else:
                    result = service.import_bookmarks(request.get_data(as_text=True))
        except OperationInProgressError:
            return error_response('An import is already running.', 409)
        except ImportRejectedError as e:
            logger.error(f"Import rejected: {str(e)}")
            return error_response(str(e), 400)

        if result.is_empty:
            return error_response('Import completed, but no valid bookmarks were found.', 422)
        return {
            'imported': len(result.accepted),
            'rejected': result.rejected_count,
            'status': status_message(f'Imported {len(result.accepted)} bookmark(s).', 'success')
        }, 200

@transfer_ns.route('/export')
class ExportBookmarks(Resource):
    @transfer_ns.doc('export_bookmarks',
        description='Download personal bookmarks as pretty-printed JSON. Seed bookmarks are not included.',
        responses={
            200: 'Success. Returns the export file.',
            404: 'There are no personal bookmarks to export.'
        })
    def get(self):
        """Export personal bookmarks"""
        service = transfer_ns.bookmark_service
        if not service.user_bookmarks:
            return error_response('No personal bookmarks to export yet.', 404)
        return Response(
            service.export_bookmarks(),
            mimetype='application/json',
            headers={'Content-Disposition': f'attachment; filename={export_filename()}'}
        )
