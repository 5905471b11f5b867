from truthguard.routers import detection, sessions

__all__ = ['detection', 'sessions']
