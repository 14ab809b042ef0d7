"""Settings, provider registry and generation presets"""
