"""Sample project documents used by the test suite."""

import codecs

FULL_PROJECT = """<?xml version="1.0" encoding="UTF-8"?>
<project version="1">
    <root name="src/.."/>
    <builddir>build-dir</builddir>
    <platform>unix64</platform>
    <importproject>compile_commands.json</importproject>
    <analyze-all-vs-configs>false</analyze-all-vs-configs>
    <includedir>
        <dir name="include/"/>
        <dir name="third_party\\include"/>
    </includedir>
    <defines>
        <define name="DEBUG=1"/>
        <define name="HAVE_CONFIG_H"/>
    </defines>
    <undefines>
        <undefine>NDEBUG</undefine>
    </undefines>
    <paths>
        <dir name="src"/>
        <dir name="lib"/>
    </paths>
    <exclude>
        <path name="src/generated/"/>
    </exclude>
    <libraries>
        <library>posix</library>
        <library>qt</library>
    </libraries>
    <suppressions>
        <suppression fileName="main.c" lineNumber="12" symbolName="buf">arrayIndexOutOfBounds</suppression>
        <suppression>missingInclude</suppression>
    </suppressions>
    <addons>
        <addon>misra</addon>
        <addon>cert</addon>
    </addons>
    <tools>
        <tool>clang-analyzer</tool>
        <tool>clang-tidy</tool>
    </tools>
    <tags>
        <tag>important</tag>
    </tags>
</project>
"""

LEGACY_IGNORE_PROJECT = """<?xml version="1.0" encoding="UTF-8"?>
<project version="1">
    <ignore>
        <path name="vendor/"/>
        <path name="tests/data/"/>
    </ignore>
</project>
"""

CURRENT_EXCLUDE_PROJECT = """<?xml version="1.0" encoding="UTF-8"?>
<project version="1">
    <exclude>
        <path name="vendor/"/>
        <path name="tests/data/"/>
    </exclude>
</project>
"""

MINIMAL_PROJECT = """<?xml version="1.0" encoding="UTF-8"?>
<project version="1">
</project>
"""

NOT_A_PROJECT = """<?xml version="1.0" encoding="UTF-8"?>
<settings version="5">
    <setting id="zipcode">92101</setting>
</settings>
"""

GARBAGE = b"\x00\x01 this is <not xml at all \xff\xfe"


def write_project(tmp_path, content, name="project.cppcheck", bom=False):
    """Write content to a file under tmp_path and return its path"""
    path = tmp_path / name
    data = content.encode("utf-8") if isinstance(content, str) else content
    if bom:
        data = codecs.BOM_UTF8 + data
    path.write_bytes(data)
    return path


def project_document(body):
    """Wrap body in a project element"""
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<project version="1">\n' + body + "\n</project>\n"
    )
