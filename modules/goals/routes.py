from flask import request, jsonify, current_app, Response
from . import goals_bp
from . import goal_service


def _form_value(name):
    """Read a field from a JSON body or a form post"""
    data = request.get_json(silent=True)
    if isinstance(data, dict) and name in data:
        return data.get(name)
    return request.form.get(name)


@goals_bp.route('/')
def index():
    """Goals list, optionally filtered by ?period=daily|weekly"""
    try:
        text, goals = goal_service.list_goals(request.args.get('period'))
    except ValueError as e:
        return jsonify({'success': False, 'error': str(e)}), 400
    return jsonify({'success': True, 'text': text, 'goals': goals})


@goals_bp.route('/add', methods=['POST'])
def add():
    """Add new goal"""
    try:
        message = goal_service.add_goal(
            _form_value('type'),
            _form_value('period'),
            _form_value('target'),
        )
    except ValueError as e:
        current_app.logger.warning(f"Rejected new goal: {e}")
        return jsonify({'success': False, 'error': str(e)}), 400
    return jsonify({'success': True, 'message': message}), 201


@goals_bp.route('/progress', methods=['POST'])
def update_progress():
    """Set today's progress on every daily goal"""
    try:
        message = goal_service.update_daily_progress(_form_value('value'))
    except ValueError as e:
        return jsonify({'success': False, 'error': str(e)}), 400
    return jsonify({'success': True, 'message': message})


@goals_bp.route('/<int:number>/delete', methods=['POST'])
def delete(number):
    """Delete goal by its number in the full listing"""
    try:
        message = goal_service.remove_goal(number)
    except IndexError as e:
        return jsonify({'success': False, 'error': str(e)}), 404
    return jsonify({'success': True, 'message': message})


@goals_bp.route('/export')
def export():
    """Goals file contents"""
    return Response(goal_service.export_goals(), mimetype='text/plain')
