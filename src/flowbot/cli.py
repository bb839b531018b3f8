#!/usr/bin/env python3
"""
Command-line interface for FlowBot.

Usage:
    flowbot generate "receive order -> check stock -> ship order"
    flowbot generate "onboarding, training, review" --type roadmap --output flow.json
    flowbot serve --port 8000
"""

import argparse
import json
import sys

from .services.flowchart_generation import DiagramType, FlowchartGenerationService
from .shared import get_settings


def generate_command(args):
    """Generate one flowchart and print or save it"""
    if not args.prompt.strip():
        print("❌ Prompt is required")
        return 1

    service = FlowchartGenerationService()
    result = service.generate(args.prompt, args.type)

    payload = {
        "success": True,
        **result.graph.to_wire(),
        "prompt": args.prompt,
        "diagramType": args.type,
        "usedAI": result.provenance,
    }
    output = json.dumps(payload, indent=2)

    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(output + "\n")
        print(f"✅ Generated {len(result.graph.nodes)} nodes and {len(result.graph.edges)} edges via {result.provenance}")
        print(f"📁 Output: {args.output}")
    else:
        print(output)

    return 0


def serve_command(args):
    """Run the API server"""
    import uvicorn

    from .api import create_app

    settings = get_settings()
    uvicorn.run(
        create_app(),
        host=args.host or settings.api_host,
        port=args.port or settings.api_port,
        log_level=settings.log_level.lower()
    )
    return 0


def main():
    """Main CLI entry point"""
    parser = argparse.ArgumentParser(
        prog='flowbot',
        description='Turn natural-language descriptions into flowcharts'
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    generate_parser = subparsers.add_parser('generate', help='Generate a flowchart')
    generate_parser.add_argument('prompt', help='Description of the flow')
    generate_parser.add_argument('--type', default=DiagramType.PROCESS.value,
                                 choices=[t.value for t in DiagramType], help='Diagram type')
    generate_parser.add_argument('--output', help='Write the JSON result to this file')
    generate_parser.set_defaults(func=generate_command)

    serve_parser = subparsers.add_parser('serve', help='Start the API server')
    serve_parser.add_argument('--host', help='Bind address')
    serve_parser.add_argument('--port', type=int, help='Port')
    serve_parser.set_defaults(func=serve_command)

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return 1

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\n⚠️ Operation cancelled by user")
        return 1


if __name__ == "__main__":
    sys.exit(main())
