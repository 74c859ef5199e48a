"""
Management command to render a compiler documentation file to HTML sections.

Reads the XML documentation file produced by the compiler, transforms every
member's comment and writes the rendered sections as JSON.
"""

import json

from django.core.management.base import BaseCommand, CommandError

from xmldoc.comments.config import get_css_classes, get_xmldoc_config
from xmldoc.comments.exceptions import DocumentationFileError
from xmldoc.comments.registry import CrossReferenceRegistry
from xmldoc.comments.source import read_documentation_file
from xmldoc.generation import render_symbols, select_symbols


class Command(BaseCommand):
    help = 'Render XML documentation comments to HTML sections'

    def add_arguments(self, parser):
        parser.add_argument(
            'xml_file',
            type=str,
            help='Compiler-generated XML documentation file',
        )
        parser.add_argument(
            '--crefs',
            type=str,
            help='JSON file mapping comment ids to {"link", "display_name"}',
        )
        parser.add_argument(
            '--member',
            type=str,
            help='Render only the member with this comment id (e.g. T:MyLibrary.Widget)',
        )
        parser.add_argument(
            '--workers',
            type=int,
            help='Worker threads for the generation pass (default: XMLDOC_WORKERS)',
        )
        parser.add_argument(
            '--indent',
            type=int,
            default=2,
            help='JSON indentation (default: 2)',
        )
        parser.add_argument(
            '--async',
            action='store_true',
            dest='use_celery',
            help='Queue one Celery task per member instead of rendering in-process',
        )

    def handle(self, *args, **options):
        config = get_xmldoc_config()
        workers = options.get('workers') or config['workers']

        try:
            symbols = read_documentation_file(options['xml_file'])
            crefs = (
                CrossReferenceRegistry.from_json(options['crefs'])
                if options.get('crefs')
                else CrossReferenceRegistry()
            )
        except DocumentationFileError as e:
            raise CommandError(str(e)) from e

        symbols = select_symbols(symbols, options.get('member'))
        if not symbols:
            self.stderr.write(self.style.WARNING('No documented members to render'))
            return

        if options.get('use_celery'):
            self._queue(symbols, crefs, config)
            return

        rendered = render_symbols(
            symbols,
            crefs,
            get_css_classes(),
            workers=workers,
            max_depth=config['max_depth'],
        )
        self.stdout.write(json.dumps(rendered, indent=options['indent']))
        self.stderr.write(
            self.style.SUCCESS(f'Rendered {len(rendered)} member(s) with {workers} worker(s)')
        )

    def _queue(self, symbols, crefs, config):
        from xmldoc.tasks import render_comment_sections

        cref_data = {
            comment_id: {
                'link': crefs.lookup(comment_id).link,
                'display_name': crefs.lookup(comment_id).display_name,
            }
            for comment_id in crefs
        }
        for symbol in symbols:
            result = render_comment_sections.delay(
                symbol.comment_id,
                symbol.name,
                symbol.documentation_xml,
                cref_data,
                config['css_classes'],
            )
            self.stdout.write(f'{symbol.comment_id}\t{result.id}')
        self.stderr.write(self.style.SUCCESS(f'Queued {len(symbols)} member(s)'))
