"""国际化支持"""
