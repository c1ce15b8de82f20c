"""
ESS Root URL Configuration
Command views are mounted by the project embedding ESS.
"""

urlpatterns = []
