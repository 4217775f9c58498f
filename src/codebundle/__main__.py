from codebundle.cli import main

main()
