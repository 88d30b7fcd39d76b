"""
Central Signal Registry for quiz events.

Uses blinker so modules can react to quiz changes without importing each
other.

Usage:
    # Publisher (sender)
    from quiz_app.core.signals import quiz_created
    quiz_created.send(current_app._get_current_object(), quiz_id=1, author_id=2)

    # Subscriber (receiver) - in module's events.py
    @quiz_created.connect
    def on_quiz_created(sender, **kwargs):
        ...
"""
from blinker import Namespace

content_signals = Namespace()

# Payload: quiz_id, author_id
quiz_created = content_signals.signal('quiz_created')

# Payload: quiz_id
quiz_updated = content_signals.signal('quiz_updated')

# Payload: quiz_id
quiz_deleted = content_signals.signal('quiz_deleted')

play_signals = Namespace()

# Fired when a random-play session ends (exhausted pool or wrong answer)
# Payload: score, exhausted (bool)
random_play_finished = play_signals.signal('random_play_finished')
