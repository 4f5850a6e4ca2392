"""Plugin template: a publishable umi plugin package."""

from pathlib import Path

from kickstart.templates.common import (
    husky_package_fields,
    merge_package,
    write_common_files,
    write_file,
    write_json,
)


def create_plugin(target: Path, data: dict) -> None:
    """umi plugin built with father."""
    plugin_name = data["pluginName"]

    package = {
        "name": plugin_name,
        "version": "0.0.1",
        "description": "",
        "main": "dist/index.js",
        "types": "dist/index.d.ts",
        "files": ["dist"],
        "author": data["author"],
        "license": "MIT",
        "scripts": {
            "dev": "father dev",
            "build": "father build",
        },
        "peerDependencies": {
            "umi": data["version"],
        },
        "devDependencies": {
            "father": "^4.1.7",
            "typescript": "^5.0.3",
            "umi": data["version"],
        },
        "publishConfig": {
            "access": "public",
        },
    }
    write_json(target / "package.json", merge_package(package, husky_package_fields(data)))
    write_common_files(target, data)

    write_file(target / ".fatherrc.ts", """import { defineConfig } from 'father';

export default defineConfig({
  cjs: {},
});
""")
    write_file(target / "tsconfig.json", """{
  "compilerOptions": {
    "target": "es2019",
    "module": "commonjs",
    "declaration": true,
    "strict": true,
    "esModuleInterop": true,
    "skipLibCheck": true
  },
  "include": ["src"]
}
""")
    write_file(target / "src" / "index.ts", f"""import type {{ IApi }} from 'umi';

export default (api: IApi) => {{
  api.describe({{
    key: '{plugin_name}',
  }});

  api.onStart(() => {{
    api.logger.info('{plugin_name} is running');
  }});
}};
""")
    write_file(target / "README.md", f"""# {plugin_name}

A umi plugin.

## Usage

```ts
// .umirc.ts
export default {{
  plugins: ['{plugin_name}'],
}};
```

## Development

```bash
{data["npmClient"]} run dev
```
""")
