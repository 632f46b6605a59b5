"""
CLI Utilities Module
Contains command-line interface utilities and helper functions

进度信息写到 stderr，stdout 只输出 markdown 链接
"""

import sys

from ..i18n.i18n import t
from .logger import info as log_info, error as log_error, warning as log_warning


class CLIColors:
    """Class containing color codes for CLI output"""
    GREEN = "\033[92m"    # 成功信息
    RED = "\033[91m"      # 错误信息
    YELLOW = "\033[93m"   # 警告和提示
    BLUE = "\033[94m"     # 步骤和进度
    BOLD = "\033[1m"      # 粗体
    RESET = "\033[0m"     # 重置颜色
    CYAN = "\033[96m"     # 信息提示


def _echo(output: str) -> None:
    print(output, file=sys.stderr)


def print_step(step_num: int, message: str) -> None:
    """
    打印带编号的步骤信息，同时记录日志
    Print step information with number, and log at the same time
    """
    step_text = t("step_prefix", step_num=step_num)
    _echo(f"\n{CLIColors.BLUE}{CLIColors.BOLD}{step_text}{CLIColors.RESET} {message}")
    log_info(f"[STEP {step_num}] {message}")


def print_success(message: str) -> None:
    """
    打印成功信息，同时记录日志
    Print success information and log at the same time
    """
    success_prefix = t("success_prefix")
    _echo(f"{CLIColors.GREEN}{success_prefix} {message}{CLIColors.RESET}")
    log_info(f"SUCCESS: {message}")


def print_error(message: str) -> None:
    """
    打印错误信息，同时记录日志
    Print error information and log at the same time
    """
    error_prefix = t("error_prefix")
    _echo(f"{CLIColors.RED}{error_prefix} {message}{CLIColors.RESET}")
    log_error(f"ERROR: {message}")


def print_warning(message: str) -> None:
    """
    打印警告信息，同时记录日志
    Print warning information and log at the same time
    """
    warning_prefix = t("warning_prefix")
    _echo(f"{CLIColors.YELLOW}{warning_prefix} {message}{CLIColors.RESET}")
    log_warning(f"WARNING: {message}")


def print_info(message: str) -> None:
    """
    打印普通信息，同时记录日志
    Print regular information and log at the same time
    """
    info_prefix = t("info_prefix")
    _echo(f"{CLIColors.CYAN}{info_prefix} {message}{CLIColors.RESET}")
    log_info(message)


def confirm_action(prompt: str, default: bool = False) -> bool:
    """
    获取用户确认
    Get user confirmation
    """
    default_str = "Y/n" if default else "y/N"
    prompt = f"{CLIColors.YELLOW}{prompt} [{default_str}]{CLIColors.RESET} "

    try:
        response = input(prompt).strip().lower()
    except (KeyboardInterrupt, EOFError):
        _echo(f"\n{CLIColors.RED}{t('cancel_operation')}{CLIColors.RESET}")
        return False

    if not response:
        return default

    return response in ['y', 'yes', '是']


def safe_input(prompt: str = "", default: str = "") -> str:
    """
    安全获取用户输入的函数，取消输入时返回默认值
    Safely get user input, falling back to the default when cancelled
    """
    try:
        user_input = input(prompt).strip()
    except (KeyboardInterrupt, EOFError):
        print_error(t("input_cancelled"))
        return default
    return user_input or default
