from flask import request
from flask_restx import Namespace, Resource
from ..errors import DraftCorruptedError
from ..models.api_models import create_models
from ..services.draft_service import DEFAULT_FORM_FIELDS
from ..utils.status import error_response, status_message

drafts_ns = Namespace('drafts', description='Cached unsaved bookmark form')

form_model, _, _ = create_models(drafts_ns)

@drafts_ns.route('/')
class Draft(Resource):
    @drafts_ns.doc('load_draft',
        description='Restore the cached form. Fields missing from the cache keep their default value.',
        responses={
            200: 'Success. Returns the form fields.',
            404: 'No draft is cached.',
            422: 'The cached draft is corrupted.'
        })
    def get(self):
        """Restore the draft"""
        service = drafts_ns.draft_service
        if not service.has_draft():
            return {'fields': dict(DEFAULT_FORM_FIELDS), 'status': status_message('No draft saved yet.', 'error')}, 404
        try:
            fields = service.load_draft(DEFAULT_FORM_FIELDS)
        except DraftCorruptedError as e:
            return error_response(str(e), 422)
        return {'fields': fields, 'status': status_message('Draft restored.', 'success')}, 200

    @drafts_ns.doc('save_draft', description='Overwrite the cached form with these fields.')
    @drafts_ns.expect(form_model)
    def put(self):
        """Save the draft"""
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return error_response('Draft must be a JSON object.', 400)
        drafts_ns.draft_service.save_draft(data)
        return {'status': status_message('Draft saved locally.', 'success')}, 200

    @drafts_ns.doc('clear_draft', description='Remove the cached form.')
    def delete(self):
        """Discard the draft"""
        drafts_ns.draft_service.clear_draft()
        return {'status': status_message('')}, 200
