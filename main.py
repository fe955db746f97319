#!/usr/bin/env python3
"""
App Center Branch Build Reset

Cancels the running build of a branch, clones its build configuration from a
reference branch and starts a fresh build.
"""

import sys
import argparse
from appcenter_reset.utils.auth import AuthManager
from appcenter_reset.utils.config import Config
from appcenter_reset.utils.api_client import APIClient
from appcenter_reset.utils.progress import ProgressTracker, StageTracker
from appcenter_reset.utils.debug_logger import DebugLogger
from appcenter_reset.utils.reporter import ConsoleReporter
from appcenter_reset.models.run import OrchestrationRun
from appcenter_reset.operations.orchestrator import BuildResetOrchestrator

def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='App Center Branch Build Reset - Cancel, reconfigure and rebuild a branch'
    )
    parser.add_argument('--env-file', help='Path to environment file (default: .env)')
    parser.add_argument('--token', help='App Center API token')
    parser.add_argument('--owner', help='App owner (user or organization)')
    parser.add_argument('--app', help='App name')
    parser.add_argument('--branch', help='Branch to reset and rebuild')
    parser.add_argument('--settings-branch', help='Branch whose build configuration is cloned')
    parser.add_argument('--base-url', help='API base URL')
    parser.add_argument('--timeout', type=float, help='HTTP request timeout in seconds (default: none)')
    parser.add_argument('--log-file', help='Write a debug log to this file')
    parser.add_argument('--no-progress', action='store_true', help='Do not draw a progress bar')
    parser.add_argument('--debug', action='store_true', help='Enable debug output')
    return parser.parse_args(argv)

def main(argv=None):
    """Main entry point.

    Returns:
        int: Process exit status
    """
    args = parse_args(argv)

    env_file = args.env_file or '.env'
    config = Config.from_env(env_file).apply_args(args)

    is_valid, error = config.validate()
    if not is_valid:
        print(f"Configuration error: {error}")
        return 1

    debug_logger = DebugLogger(config.log_file, console_debug=config.debug)
    debug_logger.log(f"Owner: {config.owner}")
    debug_logger.log(f"App: {config.app}")
    debug_logger.log(f"Branch: {config.branch_name}")
    debug_logger.log(f"Settings branch: {config.reference_branch_name}")
    debug_logger.log(f"Base URL: {config.base_url}")

    run = OrchestrationRun.from_config(config)
    auth_manager = AuthManager(run.token)
    api_client = APIClient(config.base_url, auth_manager, config, config.debug, debug_logger)
    progress_tracker = ProgressTracker(enabled=not args.no_progress)
    stage_tracker = StageTracker(progress_tracker)
    reporter = ConsoleReporter(progress_tracker, debug_logger, config.output_file)

    try:
        progress_tracker.create_bar(3, f"Resetting {config.branch_name}")
        orchestrator = BuildResetOrchestrator(api_client, reporter, stage_tracker, debug_logger)
        orchestrator.run(run)
        progress_tracker.close()

        if run.succeeded:
            print(f"build_id={run.build_id}")
            return 0
        return 1

    except KeyboardInterrupt:
        progress_tracker.close()
        print("\n\nOperation cancelled by user.")
        debug_logger.log("INTERRUPTED: Operation cancelled by user")
        return 1
    except Exception as e:
        progress_tracker.close()
        print(f"\nError: {e}")
        debug_logger.log(f"FATAL ERROR: {e}")
        if config.debug:
            import traceback
            debug_logger.log(f"Traceback: {traceback.format_exc()}")
        return 1
    finally:
        api_client.close()
        debug_logger.close()

if __name__ == "__main__":
    sys.exit(main())
