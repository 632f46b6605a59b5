"""命令行输出、日志和上传入口"""
