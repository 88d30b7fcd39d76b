# File: quiz_app/modules/main/__init__.py
from flask import Blueprint

main_bp = Blueprint('main', __name__)
